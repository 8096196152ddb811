"""Enum trait core: declaration, resolution, registry, members, coercion, validation.

Host-agnostic. Framework specifics live in ``enum_traits.hosts``.
"""
