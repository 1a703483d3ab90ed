"""Shell hooks, environment export scripts and shell process handling."""