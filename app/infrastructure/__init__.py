"""
Infrastructure layer for the lead-capture backend.

This layer contains the implementation details for external systems integration:
- Database (SQLAlchemy)
- Secret vault
- Email delivery (Resend, remote mailer function)
- Template storage (Supabase)

The infrastructure layer implements interfaces defined in the domain layer,
following the Dependency Inversion Principle of Clean Architecture.
"""
