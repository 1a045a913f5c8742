"""
ABI type resolution and TypeScript type rendering
"""
