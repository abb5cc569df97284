"""
Cross-cutting core: errors, dependency container, request context.
"""
