"""
TF-IDF scoring module for weighting terms in documents of an inverted index.
"""
