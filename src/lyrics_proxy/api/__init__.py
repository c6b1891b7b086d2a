"""HTTP interface for lyrics-proxy."""
