"""Routing — pattern segments, the route tree index, rendering and query strings.

The index is built once from the declared patterns and never mutated;
rendering and serialization are pure functions over it.
"""
