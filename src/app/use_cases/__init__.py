"""
Use Cases

Organized into domain folders:
- auth/: Registration, OTP verification, login, password reset
- users/: Session gate and profile
- tasks/: Task CRUD
- trash/: Soft-delete retention and restore

Import from subdirectories for better organization.
"""
