HEADER_TERMINATOR = b"\r\n\r\n"
