import os

SCHEMA_VERSION = "1.0.0"
ENGINE_COMMIT = os.getenv("ENGINE_COMMIT", "dev")
