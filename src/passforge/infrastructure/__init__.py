"""Infrastructure layer — preference file and clipboard backends.

Depends on domain only; never imports from services, commands, or output.
"""
