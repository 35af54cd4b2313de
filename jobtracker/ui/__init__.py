"""Widget descriptions, styles and the view built from the tracker state."""