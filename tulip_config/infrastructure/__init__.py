# Infrastructure
