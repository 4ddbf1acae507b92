"""User-facing interfaces for docimpl."""
