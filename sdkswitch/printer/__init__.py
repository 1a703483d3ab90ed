"""Interactive terminal selection list."""