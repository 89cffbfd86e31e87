"""Infrastructure layer — content directory discovery and the case study store.

The store is the only component that touches the filesystem. It raises
domain errors; the service layer turns them into ServiceResult payloads.
"""
