# Supabase table: matches
# This file documents the expected database schema
# Actual operations go through the DocumentStore in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key, default: gen_random_uuid())
- pair_key: text (not null, unique) - canonical unordered pair, "<lower id>:<higher id>"
- group_ids: text[] (not null) - the two group ids, sorted
- created_at: timestamptz (default: now())
- seq: bigint (generated always as identity)

The unique constraint on pair_key is what makes duplicate matches impossible:
two concurrent creators both upsert with on_conflict=pair_key and at most one
row is ever written. Rows are never updated or deleted.
"""
