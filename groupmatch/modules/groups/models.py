# Supabase tables: groups, users
# This file documents the expected database schema
# Group profiles are created and edited outside this service; it only reads them.

"""
Expected Supabase table structure:

groups:
- id: text (primary key)
- name: text (not null)
- bio: text (not null, default: '')
- photo_url: text (not null, default: '')
- admin_user_id: uuid (foreign key to auth.users.id, not null) - the creating user
- created_at: timestamptz (default: now())

users:
- id: uuid (primary key, foreign key to auth.users.id)
- group_id: text (foreign key to groups.id, nullable) - at most one group per user
"""
