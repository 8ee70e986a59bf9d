"""Unit tests.

Purpose
- Verify a single module/function in isolation.

Guidelines
- Only ``test_paths`` touches the filesystem, and only under ``tmp_path``.
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic.
"""
