"""Domain layer - ledger entities and ports.

Structure:
- entities/: HistoricalTransaction and ApiAccessLog
- enums/: Transaction type/status, payment method, HTTP method
- protocols/: Cache, repository, audit writer and logger ports

The domain layer has NO dependencies on any framework or infrastructure.
"""
