"""
Adapters: thin Google API wrappers.

Raise DriveError subclasses (never HttpError) and return models types.
Must not import tools/.
"""
