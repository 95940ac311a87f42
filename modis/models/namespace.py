##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Modis
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Modis.
##############################################################################

"""
Key and namespace resolution for Modis models.

A record of `Outer.InnerModel` with ID 3 lives at `modis:outer:inner_model:3`:
the library prefix, the model's namespace, and the ID joined with `:`.
"""

from typing import Optional

from modis.config.configfile import get_prefix
from modis.models.registry import check_namespace


class NamespaceMixin:
    """
    Mixin resolving namespaces and keys for a model class and its instances.

    Methods:
        namespace: The model's namespace.
        set_namespace: Override the model's namespace, or reset it with None.
        absolute_namespace: The namespace with the library prefix.
        key_for: The key for a given ID.
    """

    @classmethod
    def namespace(cls) -> str:
        return cls._entry().namespace

    @classmethod
    def set_namespace(cls, namespace: Optional[str]):
        """
        Override the namespace of this model class. Passing None restores the
        namespace derived from the class name.

        Args:
            namespace: The new namespace, or None.

        Raises:
            (exceptions.ModisError): If `namespace` is an empty string.
        """
        check_namespace(namespace)
        cls._entry().namespace_override = namespace

    @classmethod
    def absolute_namespace(cls) -> str:
        return f"{get_prefix()}:{cls.namespace()}"

    @classmethod
    def key_for(cls, record_id: int) -> str:
        return f"{cls.absolute_namespace()}:{record_id}"

    @property
    def key(self) -> Optional[str]:
        """The record's key, or None if it has never been saved."""
        if self.id is None:
            return None
        return self.key_for(self.id)
