"""Core logic for the Schema Builder.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- create and look up field definitions
- add/update/delete fields at any depth of the field tree
- serialize the tree into an example document
"""
