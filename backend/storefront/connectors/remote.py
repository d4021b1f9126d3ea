"""
Remote base class

A Remote builds requests for one family of endpoints and decodes the replies
with a Mapper. Exactly one network attempt is made per call.
"""
import logging
from typing import TypeVar

from storefront.connectors.network import Network, Request
from storefront.mappers.base import Mapper
from storefront.mappers.error_mapper import RemoteErrorMapper

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Remote:
    """Base class for endpoint families"""

    def __init__(self, network: Network):
        self.network = network
        self._error_mapper = RemoteErrorMapper()

    async def enqueue(self, request: Request, mapper: Mapper[T]) -> T:
        """
        Perform the request and decode the reply

        Raises:
            NetworkError: transport failure or no reply
            RemoteError: error-shaped reply
            DecodingError: reply doesn't match the expected entity
        """
        data = await self.network.response_data(request)

        remote_error = self._error_mapper.map(data)
        if remote_error is not None:
            logger.error(f"Remote error for {request.method} {request.path}: {remote_error}")
            raise remote_error

        return mapper.map(data)
