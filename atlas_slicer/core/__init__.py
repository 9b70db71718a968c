"""atlas_slicer.core — Foundation layer.

Contains the types, error hierarchy, descriptor parser, slice mapper,
importer config sink, sheet I/O and report builder.
This module has NO dependencies on atlas_slicer.commands or atlas_slicer.registry.
Only stdlib and PIL are allowed here.
"""
