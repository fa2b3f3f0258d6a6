"""Interactive editor panels, widgets and file dialogs drawn with pygame."""