"""
Codec - Contract program encoding (gzip + base64 over canonical JSON).
"""
