#!/usr/bin/env python3
import os

import aws_cdk as cdk
from dotenv import load_dotenv
from aws_cdk import Aspects
from cdk_nag import AwsSolutionsChecks

from image_thumbnails.image_thumbnails_stack import ImageThumbnailsStack


load_dotenv()
account = os.getenv("AWS_ACCOUNT_ID")
region = os.getenv("AWS_REGION")

app = cdk.App()

stack = ImageThumbnailsStack(app, "ImageThumbnailsStack",
                             env=cdk.Environment(account=account, region=region),
                             )

Aspects.of(app).add(AwsSolutionsChecks())

app.synth()
