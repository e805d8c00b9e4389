"""Renderers that turn file details into styled table cells."""