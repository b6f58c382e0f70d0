"""Version manager for Node.js runtime distributions."""
