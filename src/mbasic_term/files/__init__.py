from .store import VirtualFile, VirtualFileStore
