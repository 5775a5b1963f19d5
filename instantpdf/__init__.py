"""InstantPDF client-side usage ledger."""
