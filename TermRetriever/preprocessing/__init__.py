"""
Preprocessing module turning raw document text into index terms.
Includes tokenization, lowercase conversion, punctuation splitting and stemming.
"""
