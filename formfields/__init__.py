"""
Form field descriptors for server-side form rendering.
"""
