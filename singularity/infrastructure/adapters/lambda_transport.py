import json

import structlog
from aiobotocore.session import get_session

from ...domain.ports import InvocationResult, Transport, TransportMode
from ..logging import Timer

logger = structlog.get_logger()


class LambdaTransport(Transport):
    """Forwards events to another Lambda function by name."""

    def __init__(
        self,
        function_name: str,
        region: str = "us-east-1",
        endpoint_url: str | None = None,
    ) -> None:
        self._function_name = function_name
        self._region = region
        self._endpoint_url = endpoint_url
        self._session = get_session()

    @property
    def mode(self) -> TransportMode:
        return TransportMode.REMOTE

    @property
    def function_name(self) -> str:
        return self._function_name

    async def invoke(self, event: dict) -> InvocationResult:
        """Invoke the target function synchronously and read its payload."""
        client_kwargs = {"region_name": self._region}
        if self._endpoint_url:
            client_kwargs["endpoint_url"] = self._endpoint_url

        try:
            with Timer() as timer:
                async with self._session.create_client("lambda", **client_kwargs) as client:
                    response = await client.invoke(
                        FunctionName=self._function_name,
                        InvocationType="RequestResponse",
                        Payload=json.dumps(event).encode("utf-8"),
                    )
                    payload = await response["Payload"].read()

        except Exception as e:
            logger.error(
                "Lambda invocation failed",
                function_name=self._function_name,
                error=str(e),
            )
            return InvocationResult(success=False, error=e)

        function_error = response.get("FunctionError")
        if function_error:
            # The target raised; its error document is still the payload
            logger.warning(
                "Target function reported an error",
                function_name=self._function_name,
                function_error=function_error,
            )

        logger.info(
            "Lambda invoked",
            function_name=self._function_name,
            status_code=response.get("StatusCode"),
            duration_ms=timer.duration_ms,
        )

        return InvocationResult(
            success=True,
            payload=payload,
            status_code=response.get("StatusCode"),
            function_error=function_error,
        )
