# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the business logic:
# - models/: Pydantic schemas for request validation and responses
# - handlers/: Per-operation request handlers and their business rules
# - services/: User storage service (Supabase + bcrypt)
# =============================================================================
