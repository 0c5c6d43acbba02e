# Block processing pipeline (file -> blocks -> LLM -> verified quotes -> CSV)

from .block_processor import (
    SentenceBuffer,
    BlockResult,
    FileResult,
    process_block,
    process_file,
)

__all__ = [
    'SentenceBuffer',
    'BlockResult',
    'FileResult',
    'process_block',
    'process_file',
]
