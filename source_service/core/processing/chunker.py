"""
Fixed-window text chunker.

Splits text into overlapping windows measured in Unicode code points
(Python str indexing), so multi-byte characters are never cut.
"""

from source_service.models import Chunk

DEFAULT_CHUNK_SIZE = 1000
DEFAULT_OVERLAP = 200


def split_text(
    text: str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    overlap: int = DEFAULT_OVERLAP,
) -> list[Chunk]:
    """
    Split text into ordered, overlapping chunks.

    Windows of ``chunk_size`` advance by ``chunk_size - overlap``; the last
    window is clamped to the end of the text. Each window is trimmed of
    surrounding whitespace and indexed in emission order.

    Args:
        text: Normalized plain text
        chunk_size: Window width; values <= 0 fall back to 1000
        overlap: Code points shared by consecutive windows; negatives become 0

    Returns:
        list[Chunk]: Chunks with contiguous indices starting at 0
    """
    if chunk_size <= 0:
        chunk_size = DEFAULT_CHUNK_SIZE
    if overlap < 0:
        overlap = 0

    length = len(text)
    if length <= chunk_size:
        return [Chunk(text=text.strip(), index=0)]

    stride = chunk_size - overlap
    chunks: list[Chunk] = []
    start = 0
    while start < length:
        end = min(start + chunk_size, length)
        chunks.append(Chunk(text=text[start:end].strip(), index=len(chunks)))
        # Non-positive stride would never advance
        if stride <= 0:
            break
        start += stride

    return chunks
