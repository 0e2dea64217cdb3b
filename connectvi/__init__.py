"""ConnectVI transit query and live position engine"""
