"""Build metadata, rewritten by ``scripts/stamp_build.py`` when packaging."""

BUILD_TIMESTAMP = "unknown"
BUILD_PROFILE = "debug"
