from .application import Application, ApplicationUploadPath

__all__ = [
    'Application',
    'ApplicationUploadPath',
]
