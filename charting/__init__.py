"""Declarative Chart.js configuration helpers.

Charts are assembled from labels, named series and a rotating color palette,
then serialized into a single `<canvas>` element whose `data-*` attributes are
consumed by the client-side Chart.js bootstrap script.
"""
