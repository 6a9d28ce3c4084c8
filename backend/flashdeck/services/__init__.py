"""Service Layer — per-entity handlers and flashcard generation.

Invariants:
    - Services depend on core/ Protocols, never on the Supabase or Anthropic SDKs
    - Each handler method issues at most one store call, plus the library
      find-or-create where the folder/library endpoints need it
"""
