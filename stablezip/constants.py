import zipfile


# Archive types
ARCHIVE_TYPE_ZIP = "zip"

# Compression method for every entry (and the container-wide default)
DEFAULT_METHOD = zipfile.ZIP_DEFLATED

# Timestamp for entries that have no filesystem source. The zip format
# cannot express anything earlier than 1980.
FIXED_DATE_TIME = (1980, 1, 1, 0, 0, 0)


DIGEST_CHUNK_SIZE = 1_048_576  # 1 MiB

# Permission bits stored for entries built from bytes rather than files
DEFAULT_ENTRY_MODE = 0o644

# Host system recorded in every entry header (3 = Unix), independent of the
# platform doing the writing
CREATE_SYSTEM_UNIX = 3
