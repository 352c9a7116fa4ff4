"""Store initialization: schema, region layout and operator record."""

from typing import Optional

from common.constants import ZERO_ADDRESS
from common.logging_config import get_logger
from registry.database import init_database, write_transaction
from registry.ledger import LedgerClock
from registry.services.access_gate import AccessGate
from registry.services.record_registry import RecordRegistry
from registry.storage.layout import RegistryLayout
from registry.storage.safe_math import format_address, parse_address

logger = get_logger(__name__)


def deploy_registry(operator_address: Optional[str] = None, clock: Optional[LedgerClock] = None) -> RecordRegistry:
    """
    Initialize the store and wire a RecordRegistry over it.

    The first deployment records ``operator_address`` as the only identity
    allowed to pause. Later deployments keep the recorded operator.

    Args:
        operator_address: Hex address of the operator (None leaves it unrecorded)
        clock: Ledger clock override (tests inject fixed time sources)

    Returns:
        RecordRegistry bound to a freshly built layout

    Raises:
        ValueError: If operator_address is not a 32-byte hex address
    """
    init_database()
    layout = RegistryLayout.build()
    gate = AccessGate(layout.paused, layout.operator)

    if operator_address:
        operator = parse_address(operator_address)
        with write_transaction() as conn:
            matches = gate.record_operator(operator, conn)
        if not matches:
            logger.warning(
                f"Configured operator {format_address(operator)} ignored; "
                f"registry keeps {format_address(gate.operator_address())}"
            )
    elif gate.operator_address() == ZERO_ADDRESS:
        logger.warning("No operator recorded; pause and unpause are disabled")

    if clock is None:
        clock = LedgerClock(layout.ledger_height)

    registry = RecordRegistry(layout, gate, clock)
    logger.info(f"Registry deployed [files={registry.total_count()}] [paused={gate.is_paused()}]")
    return registry
