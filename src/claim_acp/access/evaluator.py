"""Remote access evaluator - ask a remote endpoint whether access is allowed.

Evaluation flow:
1. Serialize the AccessRequest (compact JSON, defaults omitted)
2. GET <endpoint_url>?username=<principal_id> with the JSON body
3. No response → DENY
4. Status code in acceptable_response_codes → ALLOW, otherwise DENY

Failure semantics:
- evaluate() raises TransportError / SerializationError. An evaluation
  error is never silently turned into a deny.
- check() never raises for those failures; it returns an ERROR
  AccessResult and the caller picks fail-open or fail-closed with
  AccessResult.is_allowed(fail_closed=...).

No retries are performed here. The evaluator is stateless and safe for
concurrent calls as long as the injected transport is.
"""

from __future__ import annotations

__all__ = ["RemoteAccessEvaluator"]

import logging
from typing import TYPE_CHECKING

from claim_acp.access.decision import AccessResult, Decision, DecisionReason
from claim_acp.access.policy import RemoteAccessPolicy
from claim_acp.access.serializer import AccessRequestSerializer, JsonRequestSerializer
from claim_acp.access.transport import HttpTransport
from claim_acp.constants import USERNAME_QUERY_PARAM
from claim_acp.context.request import AccessRequest
from claim_acp.exceptions import EvaluationError
from claim_acp.telemetry.system.system_logger import get_system_logger

if TYPE_CHECKING:
    from claim_acp.telemetry.audit.decision_logger import DecisionLogger


class RemoteAccessEvaluator:
    """Converts a remote endpoint's response status into an access decision.

    Usage:
        with HttpxTransport() as transport:
            evaluator = RemoteAccessEvaluator(transport)
            allowed = evaluator.evaluate(policy, request)
    """

    def __init__(
        self,
        transport: HttpTransport,
        serializer: AccessRequestSerializer | None = None,
        *,
        decision_logger: "DecisionLogger | None" = None,
        system_logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the evaluator.

        Args:
            transport: Sends the HTTP request.
            serializer: Serializes the access request (default: compact JSON).
            decision_logger: Optional audit logger for access decisions.
            system_logger: Logger for operational events (default: system logger).
        """
        self._transport = transport
        self._serializer = serializer or JsonRequestSerializer()
        self._decision_logger = decision_logger
        self._system_logger = system_logger or get_system_logger()

    def evaluate(self, policy: RemoteAccessPolicy, request: AccessRequest) -> bool:
        """Decide whether the principal may access the service.

        Args:
            policy: Remote endpoint access policy of the service.
            request: The access request.

        Returns:
            True if the endpoint answered with an acceptable status code.
            False for any other status code or when no response was received.

        Raises:
            TransportError: If the HTTP request failed (bad URL, network fault, timeout).
            SerializationError: If the request could not be serialized.
        """
        try:
            result = self._decide(policy, request)
        except EvaluationError as e:
            self._record(policy, request, AccessResult.from_error(e))
            raise
        self._record(policy, request, result)
        return result.allowed

    def check(self, policy: RemoteAccessPolicy, request: AccessRequest) -> AccessResult:
        """Decide access, reporting evaluation failures as an ERROR result.

        Args:
            policy: Remote endpoint access policy of the service.
            request: The access request.

        Returns:
            AccessResult with decision ALLOW, DENY or ERROR.
        """
        try:
            result = self._decide(policy, request)
        except EvaluationError as e:
            result = AccessResult.from_error(e)
        self._record(policy, request, result)
        return result

    def _decide(self, policy: RemoteAccessPolicy, request: AccessRequest) -> AccessResult:
        """Send the request and map its status code to a decision.

        Raises:
            EvaluationError: On serialization or transport failure.
        """
        body = self._serializer.serialize(request)
        status_code = self._transport.get(
            policy.endpoint_url,
            params={USERNAME_QUERY_PARAM: request.principal_id},
            body=body,
            timeout=policy.timeout_seconds,
        )

        if status_code is None:
            return AccessResult(decision=Decision.DENY, reason=DecisionReason.NO_RESPONSE)

        if policy.accepts(status_code):
            return AccessResult(
                decision=Decision.ALLOW,
                reason=DecisionReason.STATUS_ACCEPTED,
                status_code=status_code,
            )
        return AccessResult(
            decision=Decision.DENY,
            reason=DecisionReason.STATUS_REJECTED,
            status_code=status_code,
        )

    def _record(self, policy: RemoteAccessPolicy, request: AccessRequest, result: AccessResult) -> None:
        if result.decision is Decision.ERROR:
            self._system_logger.warning(
                {
                    "event": "remote_access_evaluation_failed",
                    "message": f"Remote access evaluation failed for service '{request.service_id}': "
                    f"{result.error}",
                    "service_id": request.service_id,
                    "endpoint_url": policy.endpoint_url,
                    "reason": result.reason.value,
                }
            )
        elif result.reason is DecisionReason.NO_RESPONSE:
            self._system_logger.warning(
                {
                    "event": "remote_access_no_response",
                    "message": f"No response from {policy.endpoint_url}; access denied",
                    "service_id": request.service_id,
                    "endpoint_url": policy.endpoint_url,
                }
            )

        if self._decision_logger is not None:
            self._decision_logger.log_access(request, result)
