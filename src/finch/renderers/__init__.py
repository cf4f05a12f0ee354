"""Built-in renderers.

Each module exposes an async ``render_file(file_path, view_data)`` action
suitable for ``RendererRegistry.register()``.
"""
