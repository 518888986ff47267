"""Helpers shared by scoring, signals and backtest."""
