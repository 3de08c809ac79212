"""Projects: the resource type guarded by ``ProjectAclService``."""
