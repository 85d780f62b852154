"""
Feedback collection backend.

- models: the persisted feedback record
- store: flat-file JSON persistence with a single serialization lock
- chat: single-turn passthrough to Gemini
- config: environment-driven settings
"""
