"""
MurmurHash3 x86_32 and the name -> seed hash built on it.

Names are hashed over their UTF-16 code units, serialized with an explicit
byte order, with hash seed 0. A string "hello" therefore always maps to
seed 3619887497 regardless of the host platform.
"""

from xoshiro128.splitmix32 import fmix32
from xoshiro128.uint32 import MASK32, mul32, rotl32

C1 = 0xCC9E2D51
C2 = 0x1B873593

_UTF16_CODECS = {
    "little": "utf-16-le",
    "big": "utf-16-be",
}


def _scramble(k: int) -> int:
    k = mul32(k, C1)
    k = rotl32(k, 15)
    return mul32(k, C2)


def murmur3_32(data: bytes, seed: int = 0) -> int:
    """MurmurHash3 x86_32 of data; 4-byte blocks are read little-endian."""
    h = seed & MASK32
    length = len(data)
    nblocks = length // 4

    for i in range(nblocks):
        k = int.from_bytes(data[i * 4:i * 4 + 4], "little")
        h ^= _scramble(k)
        h = rotl32(h, 13)
        h = (mul32(h, 5) + 0xE6546B64) & MASK32

    tail = data[nblocks * 4:]
    k = 0
    rem = length & 3
    if rem == 3:
        k ^= tail[2] << 16
    if rem >= 2:
        k ^= tail[1] << 8
    if rem >= 1:
        k ^= tail[0]
        h ^= _scramble(k)

    h ^= length & MASK32
    return fmix32(h)


def hash_name(name: str, byteorder: str = "little") -> int:
    """
    Hash a generator name into a 32-bit seed.

    Args:
        name: Any Python string; astral characters count as two code units.
        byteorder: "little" or "big", how each UTF-16 code unit is laid out
            before hashing.

    Raises:
        ValueError: byteorder is neither "little" nor "big"
    """
    try:
        codec = _UTF16_CODECS[byteorder]
    except KeyError:
        raise ValueError(f"byteorder must be 'little' or 'big': {byteorder!r}") from None

    # surrogatepass keeps lone surrogates hashable as raw code units
    return murmur3_32(name.encode(codec, "surrogatepass"), 0)
