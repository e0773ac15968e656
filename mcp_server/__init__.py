# HTTP tool server for the Twitter search tools
