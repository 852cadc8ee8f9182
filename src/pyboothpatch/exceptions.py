"""Custom exceptions for PyBoothPatch.

The engines never raise for catalog lookups; these are raised by the
catalog and the ``Booth`` command layer only.
"""


class BoothError(Exception):
    """
    Raised when a booth command or catalog query cannot be carried out.
    """

    pass


class DeviceNotFoundError(BoothError):
    """Raised when a device id is not in the catalog."""

    def __init__(self, device_id: str, available_ids: list):
        self.device_id = device_id
        self.available_ids = available_ids
        super().__init__(
            f"Device '{device_id}' not found in catalog. "
            f"Available devices: {available_ids}"
        )


class ItemNotFoundError(BoothError):
    """Raised when an instance id does not name a placed item."""

    def __init__(self, instance_id: str):
        self.instance_id = instance_id
        super().__init__(f"No placed item with instance id '{instance_id}'")


class DuplicateDeviceError(BoothError):
    """Raised when a catalog is built with two definitions sharing an id."""

    def __init__(self, device_id: str):
        self.device_id = device_id
        super().__init__(
            f"Device id '{device_id}' is defined more than once in the catalog"
        )
