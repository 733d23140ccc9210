"""crockid verify - structured PASS/FAIL verdicts for encoded identifiers."""
