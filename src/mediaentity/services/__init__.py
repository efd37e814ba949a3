"""Service layer — file-level hydration returning ServiceResult."""
