SEPARATOR_LINE_LENGTH = 60

# Bytes of a little-endian 32-bit field
WORD_SIZE = 4
