"""Terminal UI for RepoTyper"""
