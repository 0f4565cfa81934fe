"""
Codec for the controller's 16 byte object identifiers.

The controller sends identifiers as a little-endian ``uint32``, two
little-endian ``uint16`` values and 8 trailing bytes in wire order. The
text form is the controller's own ``xxxxxxxx-xxxx-xxxx-xxxxxxxxxxxxxxxx``.
"""
from __future__ import annotations

UUID_SIZE = 16

# (size, reversed) for each wire group
_GROUPS: tuple[tuple[int, bool], ...] = ((4, True), (2, True), (2, True), (8, False))


def read_uuid(data: bytes) -> str:
    """
    Convert 16 raw identifier bytes into the controller's lowercase text form.

    Args:
        data: Exactly 16 bytes in wire order.

    Returns:
        The 35 character 8-4-4-16 identifier.

    Raises:
        ValueError: If ``data`` is not 16 bytes long.
    """
    if len(data) != UUID_SIZE:
        raise ValueError(f"UUID requires {UUID_SIZE} bytes, got {len(data)}")

    parts: list[str] = []
    pos = 0
    for size, swap in _GROUPS:
        group = bytes(data[pos: pos + size])
        pos += size
        parts.append((group[::-1] if swap else group).hex())

    return "-".join(parts)


def uuid_to_bytes(text: str) -> bytes:
    """
    Convert identifier text back into the 16 byte wire form.

    Accepts the controller's 8-4-4-16 layout and the standard
    8-4-4-4-12 layout.
    """
    groups = text.strip().lower().split("-")
    if len(groups) == 5:
        groups = groups[:3] + [groups[3] + groups[4]]
    if len(groups) != 4 or [len(g) for g in groups] != [8, 4, 4, 16]:
        raise ValueError(f"Not a valid identifier: {text!r}")

    try:
        raw = [bytes.fromhex(g) for g in groups]
    except ValueError as exc:
        raise ValueError(f"Not a valid identifier: {text!r}") from exc

    return raw[0][::-1] + raw[1][::-1] + raw[2][::-1] + raw[3]
