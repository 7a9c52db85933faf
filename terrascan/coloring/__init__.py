"""ANSI coloring of strings and the rules for coloring rendered output fields."""