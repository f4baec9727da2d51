# Plain unicode so the bar renders it without a Nerd Font.
warning = "⚠"
