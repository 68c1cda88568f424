#!/usr/bin/env python3
"""
CDK Application for Spotify + Goodreads Stats
"""
import os
import aws_cdk as cdk
from stacks.stats_stack import StatsStack

app = cdk.App()

# Get environment from context or environment variables
environment = app.node.try_get_context("environment") or os.environ.get("ENVIRONMENT", "prod")
account = app.node.try_get_context("account") or os.environ.get("CDK_DEFAULT_ACCOUNT")
region = app.node.try_get_context("region") or os.environ.get("CDK_DEFAULT_REGION", "us-east-1")
goodreads_user_id = app.node.try_get_context("goodreads_user_id") or os.environ["GOODREADS_USER_ID"]

# Environment configuration
env = cdk.Environment(account=account, region=region)

# Stack name prefix based on environment
stack_prefix = f"TasteStats-{environment.title()}"

stats_stack = StatsStack(
    app, f"{stack_prefix}-Stats",
    deployment_env=environment,
    goodreads_user_id=goodreads_user_id,
    env=env
)

# Tag all resources
cdk.Tags.of(app).add("Project", "TasteStats")
cdk.Tags.of(app).add("Environment", environment)
cdk.Tags.of(app).add("Repository", "taste_stats")

app.synth()
