"""
Graduation requirement models.

A RequirementSpec is a tree at most two levels deep:

    RequirementSpec(total_credits=124)
    ├── CategoryRequirement("Liberal Arts", subcategories=[...])
    │   ├── SubcategoryRequirement("Humanities", min_credits=2)
    │   └── SubcategoryRequirement("Social Science", min_credits=2)
    └── CategoryRequirement("Teacher Training", min_credits=0)

The nodes that carry a credit threshold (a category with no subcategories,
or a subcategory) are "leaves". Leaf names are canonical category labels.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class SubcategoryRequirement:
    name: str
    min_credits: int = 0
    required_credits: Optional[int] = None
    is_required: bool = False


@dataclass(frozen=True)
class CategoryRequirement:
    """
    A top-level requirement entry.

    Either a leaf (min_credits / required_credits set directly) or a parent
    with subcategories. The two forms are never mixed in one entry; the
    loader drops a parent's own credits when it has subcategories.
    is_required only applies to the category as a leaf.
    """
    category: str
    min_credits: int = 0
    required_credits: Optional[int] = None
    is_required: bool = False
    subcategories: tuple = ()

    @property
    def is_leaf(self) -> bool:
        return not self.subcategories


@dataclass(frozen=True)
class RequirementLeaf:
    """A flattened requirement node with its effective threshold."""
    name: str
    required: int
    is_mandatory: bool
    parent: Optional[str] = None


@dataclass(frozen=True)
class RequirementSpec:
    total_credits: int
    categories: tuple = field(default_factory=tuple)

    def leaves(self) -> list:
        """
        Flatten the spec into its credit-bearing leaves, in spec order.

        required falls back to min_credits when required_credits is absent.
        A subcategory is mandatory only when it sets is_required itself;
        the parent's flag does not carry over.
        """
        leaves = []
        for category in self.categories:
            if category.is_leaf:
                leaves.append(RequirementLeaf(
                    name=category.category,
                    required=_effective_required(category.required_credits, category.min_credits),
                    is_mandatory=category.is_required,
                ))
                continue
            for sub in category.subcategories:
                leaves.append(RequirementLeaf(
                    name=sub.name,
                    required=_effective_required(sub.required_credits, sub.min_credits),
                    is_mandatory=sub.is_required,
                    parent=category.category,
                ))
        return leaves


def _effective_required(required_credits: Optional[int], min_credits: int) -> int:
    if required_credits is None:
        return min_credits
    return required_credits
