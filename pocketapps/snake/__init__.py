"""Snake: the rules of the board and the app flow around the game."""