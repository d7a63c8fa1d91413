import matplotlib

# Figures are only written to files, never shown
matplotlib.use("Agg")
