# Supabase Auth
# Authentication is delegated to Supabase's built-in auth system.
# This service only resolves a bearer token to the signed-in user;
# registration, login and sessions are handled by the client SDK.

"""
Supabase Auth provides:
- auth.get_user() - Get current user from JWT token

The user -> group link lives in the public.users table (see groups/models.py).
"""
