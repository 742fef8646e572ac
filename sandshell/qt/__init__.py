"""PyQt6 frontend for the sandshell control panel."""
