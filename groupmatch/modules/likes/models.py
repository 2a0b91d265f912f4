# Supabase table: likes
# This file documents the expected database schema
# Actual operations go through the DocumentStore in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key, default: gen_random_uuid())
- from_group_id: text (foreign key to groups.id, not null)
- to_group_id: text (foreign key to groups.id, not null)
- created_at: timestamptz (default: now())
- seq: bigint (generated always as identity)
- unique constraint on (from_group_id, to_group_id)
- check constraint from_group_id <> to_group_id

Rows are never updated or deleted.
"""
