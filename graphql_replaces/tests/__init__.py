# Copyright 2019-present Kensho Technologies, LLC.
