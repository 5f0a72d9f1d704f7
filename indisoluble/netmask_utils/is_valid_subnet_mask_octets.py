#!/usr/bin/env python3

"""IPv4 subnet mask validation utilities.

Provides functions to check that a subnet mask, given as its four octets,
is a contiguous run of 1-bits followed by a contiguous run of 0-bits.
"""

import logging

from typing import Tuple


def is_valid_subnet_mask_octets(mask_octets: Tuple[int, int, int, int]) -> bool:
    """Check that no 1-bit follows a 0-bit across the four mask octets."""
    seen_zero_bit = False
    for octet_index, octet in enumerate(mask_octets):
        for bit in range(7, -1, -1):
            if not (octet >> bit) & 0x1:
                seen_zero_bit = True
            elif seen_zero_bit:
                logging.debug(
                    "Subnet mask %s is not contiguous: bit %d of octet %d set after a 0",
                    ".".join(str(o) for o in mask_octets),
                    bit,
                    octet_index,
                )
                return False

    return True
