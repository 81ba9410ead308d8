"""Cloud-init user-data encoding."""

import base64
import gzip
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Optional, Union

from kitchen_oci.config.schemas.driver_schema import UserDataItem
from kitchen_oci.domain.base.exceptions import InvalidUserDataError
from kitchen_oci.infrastructure.logging.logger import get_logger
from kitchen_oci.providers.oci.utilities.random_generator import RandomGenerator

logger = get_logger(__name__)

GZIP_MAGIC = b"\x1f\x8b"

UserData = Union[str, Iterable[Union[UserDataItem, Mapping[str, Any]]]]


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii").replace("\n", "")


class UserDataEncoder:
    """Turn the ``user_data`` config value into a transport-safe string."""

    def __init__(self, generator: Optional[RandomGenerator] = None) -> None:
        self.generator = generator or RandomGenerator()

    def encode(self, user_data: Optional[UserData]) -> Optional[str]:
        """
        Encode user data for the instance metadata.

        A plain string is base64 encoded as is. A list of items becomes a
        gzip-compressed multi-part MIME message, then base64 encoded.

        :param user_data: A string, a list of items, or None.
        :return: The encoded payload, or None when there is nothing to send.
        :raises InvalidUserDataError: If an item has neither path nor inline content.
        :raises OSError: If a referenced file cannot be read.
        """
        if not user_data:
            return None
        if isinstance(user_data, str):
            return _b64(user_data.encode("utf-8"))

        text = self.build_multipart(user_data)
        logger.debug("Built multi-part user data of %d bytes", len(text))
        return _b64(gzip.compress(text.encode("utf-8"), mtime=0))

    def build_multipart(
        self,
        items: Iterable[Union[UserDataItem, Mapping[str, Any]]],
        boundary: Optional[str] = None,
    ) -> str:
        """Assemble the multi-part MIME text before compression."""
        boundary = boundary or f"MIMEBOUNDARY_{self.generator.random_string(20)}"
        lines = [
            f'Content-Type: multipart/mixed; boundary="{boundary}"',
            "MIME-Version: 1.0",
            "",
        ]
        for item in items:
            part = item if isinstance(item, UserDataItem) else UserDataItem.model_validate(item)
            lines.append(f"--{boundary}")
            lines.append(f'Content-Disposition: attachment; filename="{part.filename}"')
            lines.append("Content-Transfer-Encoding: 7bit")
            lines.append(f"Content-Type: text/{part.type}")
            lines.append("Mime-Version: 1.0")
            lines.append("")
            lines.extend(self._read_part(part))
            lines.append("")
        lines.append(f"--{boundary}--")
        return "\n".join(lines) + "\n"

    @staticmethod
    def decode(payload: str) -> str:
        """Reverse :meth:`encode`, decompressing multi-part payloads."""
        raw = base64.b64decode(payload)
        if raw[:2] == GZIP_MAGIC:
            raw = gzip.decompress(raw)
        return raw.decode("utf-8")

    @staticmethod
    def _read_part(part: UserDataItem) -> list[str]:
        if part.path:
            content = Path(part.path).read_text(encoding="utf-8")
        elif part.inline is not None:
            content = part.inline
        else:
            raise InvalidUserDataError(
                "Invalid user data", details={"filename": part.filename}
            )
        content = content.rstrip("\n")
        return content.split("\n") if content else []
