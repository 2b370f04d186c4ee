"""Serial console: choose a port and baud rate, then read and send text."""