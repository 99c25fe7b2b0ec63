"""Rock-Paper-Scissors against the computer, played in the terminal."""
