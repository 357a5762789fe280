"""Language server plumbing: framing transport, dispatcher and request loop."""
