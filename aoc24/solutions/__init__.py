"""Solutions to the daily puzzles, one dayNN module per solved day."""