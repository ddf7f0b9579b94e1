from provisioning.provisioner import (
    CollationMismatchError,
    CollectionProvisioner,
    CollectionStatus,
    ProvisionResult,
    ProvisioningError,
)

__all__ = [
    "CollationMismatchError",
    "CollectionProvisioner",
    "CollectionStatus",
    "ProvisionResult",
    "ProvisioningError",
]
