from mediaentity.cli import cli

cli()
