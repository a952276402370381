"""Dashboard-side logic: upload slots, relay client and the analysis driver."""
