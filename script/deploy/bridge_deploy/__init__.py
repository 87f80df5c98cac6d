"""World ID State Bridge deployment tool."""
