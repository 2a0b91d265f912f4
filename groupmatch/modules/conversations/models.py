# Supabase table: messages (the matches/{match_id}/messages sub-collection)
# This file documents the expected database schema
# Actual operations go through the DocumentStore in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key, default: gen_random_uuid())
- match_id: uuid (foreign key to matches.id, not null)
- author_group_id: text (foreign key to groups.id, not null)
- text: text (not null) - trimmed, non-empty
- created_at: timestamptz (default: now())
- seq: bigint (generated always as identity) - tie-breaker for equal created_at
- index on (match_id, created_at, seq)

Messages are append-only: never edited, never deleted.
"""
