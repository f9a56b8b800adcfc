"""A depth-first wget-driven web crawler, a word counter, and the linked list, hash table and string helpers they use."""

__version__ = "0.1.0"
__all__ = ["linkedlist", "hashtable", "strings", "crawler", "wordcount"]