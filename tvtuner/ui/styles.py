"""Stylesheet for the TV tuner application."""

TV_APP_CSS = """
Screen {
    layout: vertical;
}

#main_container {
    padding: 0 1;
}

#status_display {
    height: 1;
    color: $text;
    background: $boost;
    margin-bottom: 1;
}

#summary_display {
    height: auto;
    color: $text-muted;
    margin-bottom: 1;
}

#position_area, #swap_area, #search_area, #add_area {
    height: auto;
}

Input {
    width: 1fr;
}

Button {
    margin-left: 1;
}

#channels_table {
    height: 1fr;
    margin-top: 1;
}
"""
