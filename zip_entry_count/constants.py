EOCD_SIGNATURE = b"\x50\x4B\x05\x06"
EOCD_RECORD_SIZE = 22
EOCD_ENTRY_COUNT_OFFSET = 8
MAX_COMMENT_LENGTH = 0xFFFF

# Largest tail of an archive that can hold the EOCD record plus its comment.
EOCD_SEARCH_SIZE = EOCD_RECORD_SIZE + MAX_COMMENT_LENGTH
