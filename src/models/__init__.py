from .base import KubeModel, NodeSelectorRequirement, ObjectMeta

__all__ = ["KubeModel", "NodeSelectorRequirement", "ObjectMeta"]
