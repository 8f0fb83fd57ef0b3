"""
BGP decoder used by the MRT table dump parsers.
"""
