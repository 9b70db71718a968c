"""Subcommands of atlas-slicer.

Every module here that defines a `command` object is picked up by
atlas_slicer.registry.discover(). The module docstring is the command's
`atlas-slicer help <name>` text.
"""
