"""Text rendering helpers for terminal output: tables and a status bar."""