"""Deflate-family tools: checksums, zlib and gzip streams, prefix-code counting and Huffman trees."""

__version__ = "0.1.0"