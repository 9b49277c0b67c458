#!/usr/bin/env python3
"""
richhdr Core Constants - Rich header layout and file validation thresholds

This module contains the fixed layout values of the Rich header and the
limits used when validating input files.

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

# =============================================================================
# DOS Header Constants
# =============================================================================
# The legacy IMAGE_DOS_HEADER is always 64 bytes and never holds the Rich header
DOS_HEADER_SIZE = 64
DOS_MAGIC = b"MZ"
E_LFANEW_OFFSET = 0x3C  # e_lfanew field, excluded from the checksum
E_LFANEW_SIZE = 4

# =============================================================================
# Rich Header Layout
# =============================================================================
WORD_SIZE = 4
RICH_SIGNATURE = b"Rich"  # Footer anchor, stored in clear
DANS_SIGNATURE = b"DanS"  # Header anchor, stored masked with the key
DANS_SIGNATURE_VALUE = int.from_bytes(DANS_SIGNATURE, "little")  # 0x536E6144
FOOTER_SIZE = 8  # "Rich" + 32-bit key
HEADER_PADDING_WORDS = 3
MASKED_HEADER_WORDS = 1 + HEADER_PADDING_WORDS
MIN_HEADER_SIZE = MASKED_HEADER_WORDS * WORD_SIZE  # 16 bytes
TOOL_ENTRY_SIZE = 8  # u16 build, u16 tool id, u32 object count

# =============================================================================
# Integer Domains
# =============================================================================
U16_MAX = 0xFFFF
U32_MAX = 0xFFFFFFFF

# =============================================================================
# File Validation Constants
# =============================================================================
MIN_EXECUTABLE_SIZE_BYTES = DOS_HEADER_SIZE  # Smaller files cannot carry a DOS header
MIN_HEADER_SIZE_BYTES = 2  # Bytes needed to check the MZ magic
DEFAULT_MAX_FILE_SIZE_MB = 512
