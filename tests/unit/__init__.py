"""Unit tests.

Purpose
- Verify a single helper module in isolation.

Guidelines
- No network; file I/O only under pytest's ``tmp_path`` or packaged test data.
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic.
"""
