class HarnessError(Exception):
    """Base class for every error raised by the governance fork harness."""


class ForkNetworkError(HarnessError):
    """The forking node answered a JSON-RPC request with an error or an unexpected result."""

    def __init__(self, method: str, message: str, code=None):
        self.method = method
        self.code = code
        super().__init__(f"{method} failed: {message}" + (f" (code {code})" if code is not None else ""))


class MissingReceiptError(HarnessError):
    """No receipt was produced for a submitted transaction."""

    def __init__(self, tx_hash: str):
        self.tx_hash = tx_hash
        super().__init__(f"No transaction receipt for {tx_hash}")


class TransactionRevertedError(HarnessError):
    """The transaction was mined with status 0."""

    def __init__(self, tx_hash: str, receipt=None):
        self.tx_hash = tx_hash
        self.receipt = receipt
        super().__init__(f"Transaction {tx_hash} reverted")


class ProposalAssertionError(AssertionError):
    """On-chain state does not match what the scenario expected."""

    def __init__(self, message: str, mismatches=None):
        self.mismatches = mismatches or {}
        if self.mismatches:
            details = "; ".join(
                f"{field}: expected {expected!r}, got {actual!r}"
                for field, (expected, actual) in self.mismatches.items()
            )
            message = f"{message} {details}"
        super().__init__(message)
