"""Classic algorithms and data structures: sorting, searching, dynamic programming, Huffman coding, geometry, dates, billing, big integers and matrices."""

__version__ = "0.1.0"