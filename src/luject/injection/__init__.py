"""Request model, dispatch and APK repackaging."""
